from src.timebank.timebank.main import create_app

app = create_app()

if __name__ == "__main__":
    app.run(port=3000)
