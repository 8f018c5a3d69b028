"""Todo list core: store, derivation pipeline and a console front end."""
