"""HTTP layer of the Meetback API."""
