# ABOUTME: Core services that combine the metadata clients with the catalog.
# ABOUTME: Home of the work resolution pipeline.
