from hexcheck.cli.main import main

raise SystemExit(main())
