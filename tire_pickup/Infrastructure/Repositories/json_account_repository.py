from tire_pickup.Domains.Account.Models.account import Account
from tire_pickup.Domains.Account.Repositories.account_repository import AccountRepository
from tire_pickup.Infrastructure.Repositories.json_collection_repository import (
    JsonCollectionRepository,
)


class JsonAccountRepository(JsonCollectionRepository[Account], AccountRepository):
    model = Account
