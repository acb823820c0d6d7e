"""Features module for storeflow-tenancy."""
