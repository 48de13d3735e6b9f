"""
CoFlowCode

Assignment authoring and grading toolkit: typed assignment items,
deterministic auto-grading for objective questions, structural validation
of imported assignments and submission bundles, and prompt templates for
manual or AI-assisted grading.
"""

__version__ = "0.1.0"
