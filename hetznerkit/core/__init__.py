"""Core Layer: pagination engine and resource services.

Depends only on the domain layer's Transport port and on the resilience
helpers; never on httpx directly.
"""
