"""Strongly typed identifiers for identity store entities.

Using NewType for strong typing prevents mixing up record names, namespaces
and provider logins, which are all plain strings on the wire.
"""

from typing import NewType

# Store-internal record name, immutable once created
UserName = NewType("UserName", str)
Namespace = NewType("Namespace", str)
