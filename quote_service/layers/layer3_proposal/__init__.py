"""Layer 3: Proposal - 고객 제안서 작성."""

from .proposal_composer import (
    ProposalComposer,
    get_proposal_composer,
    generate_proposal,
    build_payment_schedule,
)

__all__ = [
    "ProposalComposer",
    "get_proposal_composer",
    "generate_proposal",
    "build_payment_schedule",
]
