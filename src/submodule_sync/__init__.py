"""submodule-sync — bootstrap, update and reconcile git submodules from package manifests."""

__version__ = "0.1.0"
