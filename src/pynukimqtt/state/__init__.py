"""State/store layer.

This package is the single place where decoded field updates, both from
MQTT and from optimistic command writes, are merged into the lock's
current snapshot.
"""
