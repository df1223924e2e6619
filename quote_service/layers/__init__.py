"""Processing layers for the pricing / proposal pipeline."""

# Note: Import layers individually to avoid circular imports
# Use: from quote_service.layers.layer1_pricing import PricingCalculator
# Use: from quote_service.layers.layer2_budget import BudgetComparator
# Use: from quote_service.layers.layer3_proposal import ProposalComposer

__all__ = [
    "layer1_pricing",
    "layer2_budget",
    "layer3_proposal",
]
