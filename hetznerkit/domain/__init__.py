"""Domain Layer: value types, ports, errors and events.

Has no dependency on httpx or on any other infrastructure concern.
"""
