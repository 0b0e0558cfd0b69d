"""Client-side controller and helpers for the bookmarks page."""
