"""Support services shared by the engine and its hosts."""
