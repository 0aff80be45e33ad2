from .convolutional import CodingScheme, ConvolutionalCode

__all__ = ['CodingScheme', 'ConvolutionalCode']
