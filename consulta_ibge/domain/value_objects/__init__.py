from .locality_ids import StateCode, DistrictId
from .locality_response import LocalityResponse

__all__ = ['StateCode', 'DistrictId', 'LocalityResponse']
