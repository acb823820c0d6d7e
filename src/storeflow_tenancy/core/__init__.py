"""Core building blocks shared across storeflow-tenancy features."""
