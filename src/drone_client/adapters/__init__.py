"""Adapters: everything that touches the network or process I/O."""
