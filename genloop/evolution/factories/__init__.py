from genloop.evolution.factories.base import AbstractCandidateFactory, CandidateFactory

__all__ = ["AbstractCandidateFactory", "CandidateFactory"]
