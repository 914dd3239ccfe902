"""Strongly typed identifiers for forum entities.

Identifiers are database-assigned integers. NewType keeps thread and post
ids from being mixed up at call sites.
"""

from typing import NewType

UserId = NewType("UserId", int)
ForumId = NewType("ForumId", int)
ThreadId = NewType("ThreadId", int)
PostId = NewType("PostId", int)
