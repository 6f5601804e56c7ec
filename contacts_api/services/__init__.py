"""Service Layer — store access for the Contacts collection."""
