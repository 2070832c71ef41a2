def main ( ) : print ( "Hello" )