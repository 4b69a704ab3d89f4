"""Command line front-ends for the Indigo engine."""
