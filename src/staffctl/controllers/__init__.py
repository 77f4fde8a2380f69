"""Controllers — the application's menu commands and interactive session.

Controllers wire the interaction layer to the company aggregate. They may
import from domain, infrastructure, interaction, and output.
"""
