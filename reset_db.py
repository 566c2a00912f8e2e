from dinero.core.config import get_settings
from dinero.database import create_db_and_tables, drop_db_and_tables, make_engine

engine = make_engine(get_settings().database_url)

drop_db_and_tables(engine)
create_db_and_tables(engine)

print("Database reset: users and accounts tables dropped and recreated.")
