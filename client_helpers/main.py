from client_helpers.core.app_factory import create_app

app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("client_helpers.main:app", host="127.0.0.1", port=8000)
