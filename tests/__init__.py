"""Test suite for mvg_quick_departures."""
