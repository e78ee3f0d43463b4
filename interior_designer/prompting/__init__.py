"""Prompt construction package.

Exposes deterministic builders for the system instruction, the design
suggestion prompt, vision message content, and the image prompt.
"""
