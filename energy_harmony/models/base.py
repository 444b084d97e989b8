from sqlalchemy import BigInteger, Integer

# SQLite only autoincrements INTEGER primary keys
Id = BigInteger().with_variant(Integer(), "sqlite")
