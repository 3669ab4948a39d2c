# Settings modules
