"""gswarm-check — look up Gensyn swarm ranks by EOA or peer ID."""

__version__ = "0.1.0"
