"""Infrastructure adapters: Actions runner protocol, tool process, auth."""
