"""Contest voting and wallet ledgers for the 1WAY music platform."""
