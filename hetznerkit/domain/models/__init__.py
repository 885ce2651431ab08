"""Domain models: TypedDict records and NewType identifiers."""
