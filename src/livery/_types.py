"""Shared type definitions for livery."""

from typing import Literal

# How a resource name was dispatched: bundle reference, application view,
# or plain search over the search paths
type Strategy = Literal["bundle", "view", "fallback"]
