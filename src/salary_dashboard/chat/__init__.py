"""Chat widget support: relays user questions to the assistant endpoint."""
