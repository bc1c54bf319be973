"""Host integrations for history buffers."""
