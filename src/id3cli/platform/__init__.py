"""Platform services shared by every layer."""
