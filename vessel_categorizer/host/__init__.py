"""Adapters between the host game's object model and the classifier.

Host objects are reached through the protocols in ``host.protocols``;
nothing here owns them.
"""
