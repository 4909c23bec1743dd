from todo_tracker.cli.main import main

raise SystemExit(main())
