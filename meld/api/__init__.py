"""Command API for meld: StageResult commands grouped by domain."""
