from cloud_gemini._cli import main

main()
