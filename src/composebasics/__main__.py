from composebasics.app import App


def main() -> None:
	"""
	Open the window on the configured screen (default: the name list).
	"""
	app = App()
	app.show()
	app.run()


if __name__ == "__main__":
	main()
