"""gitrelease: release facts from a local git checkout.

Reads the latest tag, the tag before it, the commit messages in between and
the owner/name of the origin remote, for feeding a release-notes generator.
"""

__version__ = "0.1.0"
