"""
Tests for the hop tree core.

Test organization:
- test_models.py: Data model tests (HopNode, HopTree, LayerStats)
- test_builder.py: Level-order expansion, concrete scenarios, limits
- test_stats.py: Layer aggregation and run summaries
- test_overflow.py: Fixed-width weight overflow detection
"""
