class RentalsError(Exception):
    """Base class for errors raised while building the DreamHome schema."""


class EvolutionOrderingError(RentalsError):
    """A schema evolution step was applied against data it cannot carry over.

    Raised instead of guessing values for new NOT NULL columns that have no
    default, e.g. splitting a free-text owner address into street/city/postcode.
    """

    def __init__(self, table, row_count, step):
        self.table = table
        self.row_count = row_count
        self.step = step
        super().__init__(
            f"{step} cannot run against {table} while it holds {row_count} row(s); "
            f"migrate or clear those rows first"
        )


class SeedError(RentalsError):
    """The seed load did not leave the database in the expected state."""
