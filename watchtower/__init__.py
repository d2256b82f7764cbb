"""WatchTower backend relay for TikTok OAuth and creator stats."""

__version__ = "0.1.0"
