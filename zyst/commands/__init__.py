"""Command builders and the handlers for string, list, hash, set and server commands."""