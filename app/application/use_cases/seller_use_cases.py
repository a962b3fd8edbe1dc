"""Public seller profile use cases"""

from typing import List, Tuple

from ...core.exceptions import NotFoundError
from ...domain.entities.listing import Listing
from ...domain.entities.user import User
from ...domain.repositories.unit_of_work import IUnitOfWork
from ...domain.value_objects.username import Username


class GetSellerProfileUseCase:

    def __init__(self, unit_of_work: IUnitOfWork):
        self.unit_of_work = unit_of_work

    async def execute(self, username: str) -> Tuple[User, List[Listing]]:
        """Lookup is case-insensitive"""
        try:
            username_vo = Username(username)
        except ValueError:
            raise NotFoundError("Seller not found.")

        async with self.unit_of_work:
            seller = await self.unit_of_work.users.get_by_username(username_vo)
            if not seller:
                raise NotFoundError("Seller not found.")
            listings = await self.unit_of_work.listings.list_active_by_seller(seller.id)
        return seller, listings
