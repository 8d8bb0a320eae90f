"""Status line composition, sinks and the tick loop."""
