"""Transport, event type resolution and the client facade."""
