"""
evlog - host-local facade over the platform event log.

Registers event sources, queries written events, and writes validated events
for a single application.

Copyright 2025 Ben Mensi
Licensed under the Apache License, Version 2.0
"""

__version__ = "0.1.0"
