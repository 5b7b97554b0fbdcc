"""Custom field lookups."""

from django.db.models import CharField, Lookup


@CharField.register_lookup
class Like(Lookup):
    """SQL ``LIKE`` with the right-hand side used as the pattern.

    ``%`` and ``_`` in the value act as wildcards. Case sensitivity follows
    the database: SQLite ignores ASCII case, PostgreSQL does not.
    """

    lookup_name = "like"

    def as_sql(self, compiler, connection):
        """Render ``<column> LIKE <pattern>``."""
        lhs, lhs_params = self.process_lhs(compiler, connection)
        rhs, rhs_params = self.process_rhs(compiler, connection)
        return f"{lhs} LIKE {rhs}", [*lhs_params, *rhs_params]
