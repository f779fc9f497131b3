"""Core services: release lookup, download, install and workflows."""
