from smiles.server import run_server


def main():
    run_server()


if __name__ == "__main__":
    main()
