from weather_proxy.main import main

main()
