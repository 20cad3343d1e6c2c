from launchsh.cli import main

raise SystemExit(main())
