"""InsuranceDAO — insurances table operations."""

from rme.dao.base import BaseDAO
from rme.models.insurance import Insurance


class InsuranceDAO(BaseDAO[Insurance]):
    model = Insurance
    unique_key = "code"
