"""State broadcasters."""

from mvg_quick_departures.adapters.broadcasters.state_broadcaster import StateBroadcaster

__all__ = ["StateBroadcaster"]
