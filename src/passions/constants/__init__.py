from passions.constants.catalog_data import DEFAULT_PASSIONS

__all__ = ["DEFAULT_PASSIONS"]
