def greet():
    print("Hi")
def shout():
    print(name)
