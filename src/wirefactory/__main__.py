from wirefactory.cli import main

raise SystemExit(main())
