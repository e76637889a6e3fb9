"""bundlekit command line interface."""
