"""Helper utilities for tests."""

import argparse


def make_args(**kwargs) -> argparse.Namespace:
    """Build the namespace a CLI command handler receives from argparse.

    Args:
        **kwargs: Attribute values for the namespace.

    Returns:
        argparse.Namespace carrying the given attributes.
    """
    return argparse.Namespace(**kwargs)
