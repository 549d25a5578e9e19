from doctags.proposals.engine import ProposalEngine
from doctags.proposals.model import TagPlan

__all__ = [
    "ProposalEngine",
    "TagPlan",
]
