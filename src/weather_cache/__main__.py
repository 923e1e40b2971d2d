from weather_cache.api.app import main

main()
