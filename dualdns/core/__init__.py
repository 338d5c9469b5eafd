# Core module - configuration, logging, exceptions
