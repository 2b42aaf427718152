"""Sample catalogue generators."""

from nocobuilds.generators.builder import BuilderGenerator, CommunityGenerator
from nocobuilds.generators.incentive import IncentiveGenerator

__all__ = ["BuilderGenerator", "CommunityGenerator", "IncentiveGenerator"]
