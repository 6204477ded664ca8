from wilayah_api.server import run_server

# Launcher for running from a checkout: regenerates the JSON tree and serves it.

def main():
    print("--- Launching wilayah API ---")
    run_server()

if __name__ == '__main__':
    main()
