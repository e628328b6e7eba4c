import uvicorn

from taskkeeper.config import settings


def main() -> None:
    uvicorn.run("taskkeeper.main:app", host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
