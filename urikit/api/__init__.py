"""urikit API: URI value type, path helpers and command functions."""
