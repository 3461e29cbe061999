"""Grid-world helpers: value types, maze model, A* path search and dot clustering."""