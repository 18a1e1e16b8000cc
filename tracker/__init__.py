"""
Source root of the Statit tracker.

This directory holds the tracker packages: core utilities, effects, character
state, the game session and turn controller, and the console interface.
"""
