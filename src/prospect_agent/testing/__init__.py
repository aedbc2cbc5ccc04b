"""Public testing utilities for the Prospect Agent.

Provides a scripted model port and a recording sleep for writing
self-contained examples and tests without API keys.
"""

from prospect_agent.testing.stub_port import ScriptedModelPort, SleepRecorder

__all__ = ["ScriptedModelPort", "SleepRecorder"]
