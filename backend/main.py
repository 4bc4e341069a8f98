from todo_api.main import create_app

# fails fast with ConfigError when DATABASE_URL or JWT_SECRET is missing
app = create_app()
