"""Infrastructure Layer: Contains concrete implementations and adapters.

Connects the library to the outside world (HTTP APIs, configuration files,
logging handlers) by implementing the interfaces defined in the domain layer.
"""
