"""Feature packages of neo-pagination."""
