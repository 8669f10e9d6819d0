"""EcoSort Presentation Layer."""
