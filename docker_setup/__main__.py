from docker_setup.main import main

main()
