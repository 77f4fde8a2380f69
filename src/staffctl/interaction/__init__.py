"""Interaction layer — validated prompts, wizards, commands, and menus.

This layer depends on stdlib, click, and rich only through
:mod:`staffctl.interaction.console`. It knows nothing about the domain.
"""
