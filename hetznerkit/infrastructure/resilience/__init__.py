"""API Resilience Implementations.

Contains the backoff calculation and the sleep primitive used when
retrying rate-limited requests and when polling actions.
Bounded Context: API Resilience
"""
