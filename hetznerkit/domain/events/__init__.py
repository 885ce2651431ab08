"""Domain Event definitions.

Represents significant occurrences (pages fetched, retries scheduled,
actions polled) that are useful when tracing a run.
"""
