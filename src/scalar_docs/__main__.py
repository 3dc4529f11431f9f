from scalar_docs.server.main import start

if __name__ == "__main__":
    start()
