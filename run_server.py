from todo_app.main import run

if __name__ == "__main__":
    # Single process, no reload: every worker would get its own in-memory state
    run()
