"""
Test support utilities for typepred tests.

Exotic values that exercise the totality guarantees, and hypothesis
strategies producing arbitrary mixed-type inputs.
"""
