"""HTTP transports for the Cloud and DNS APIs, built on httpx."""
