"""datapop — bind structured data onto design-document layer trees."""

__version__ = "0.1.0"
