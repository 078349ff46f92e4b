"""Define aliases shared by the airport types."""
TailNumber = str
