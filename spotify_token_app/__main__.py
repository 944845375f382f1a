from spotify_token_app.app import main

if __name__ == '__main__':
    main()
